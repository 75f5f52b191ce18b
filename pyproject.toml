[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cookiedog"
version = "0.1.0"
description = "A small arcade game: steer a dog around the screen and eat the cookies."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cookiedog = "cookiedog.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cookiedog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
