[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdstore"
version = "0.1.0"
description = "Keyboard-driven terminal storefront with menus, forms and a product table"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "point-of-sale", "tui", "products", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdstore = "mdstore.routes:main"

[tool.hatch.build.targets.wheel]
packages = ["mdstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
