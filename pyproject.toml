[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vosdesk"
version = "0.1.0"
description = "A tiny full-screen desktop with folder windows, a read-only text viewer and program launching"
requires-python = ">=3.10"
keywords = ["desktop", "file-browser", "pygame", "file-manager", "text-viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vosdesk = "vosdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vosdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
