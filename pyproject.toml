[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilegfx"
version = "0.1.0"
description = "Small 8x8 tile renderer drawing into a big-endian RGB565 framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiles", "tilemap", "rgb565", "framebuffer", "sprites", "retro"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilegfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
