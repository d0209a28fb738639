[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contactbook"
version = "1.0.0"
description = "A small desktop contact list with search, favorites and plain-text storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "phone book", "favorites", "desktop", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Groupware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
contactbook = "contactbook.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["contactbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
