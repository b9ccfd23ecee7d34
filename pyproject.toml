[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalterrain"
version = "0.1.0"
description = "Diamond-square height maps turned into coloured terrain meshes, with camera maths, a skybox layout and a scene model"
requires-python = ">=3.10"
keywords = ["diamond-square", "heightmap", "terrain", "fractal", "procedural", "mesh"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fractalterrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
