[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe"
version = "0.1.0"
description = "Isometric wireframe viewer for height maps, with rotation, zoom and per-point colours"
requires-python = ">=3.10"
keywords = ["wireframe", "heightmap", "isometric", "pygame", "rendering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wireframe = "wireframe.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
