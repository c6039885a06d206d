[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vgakernel"
version = "0.1.0"
description = "A simulated 320x200 VGA mode 13h framebuffer with an 8x8 bitmap font and a toy kernel that draws on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["vga", "framebuffer", "mode13h", "bitmap-font", "kernel", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vgakernel"]

[tool.pytest.ini_options]
addopts = "-ra"
