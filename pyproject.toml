[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galtonboard"
version = "0.1.0"
description = "Galton board simulation drawn on a 128x64 monochrome SSD1306-style framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["galton", "quincunx", "simulation", "histogram", "ssd1306", "framebuffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
galtonboard = "galtonboard.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["galtonboard"]

[tool.pytest.ini_options]
addopts = "-ra"
