[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strafe"
version = "0.1.0"
description = "Core pieces of a small real-time 3D engine: shader type tables, input state tracking, layer stacks, render graphs, a block memory pool and hierarchical transforms."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["engine", "rendering", "input", "render-graph", "transform", "opengl", "memory-pool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["strafe"]

[tool.pytest.ini_options]
addopts = "-ra"
