[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcd1602"
version = "0.1.0"
description = "Drive HD44780-compatible 16x2 character LCDs from GPIO pins, with line animations, a terminal stand-in display and a GIF player"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["lcd", "lcd1602", "hd44780", "gpio", "sysfs", "display", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lcd1602-demo = "lcd1602.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lcd1602"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
