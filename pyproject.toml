[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arena-alloc"
version = "1.0.0"
description = "A first-fit free-list allocator that manages a fixed-size byte arena"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "free-list", "memory", "arena", "coalescing", "first-fit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arena-alloc-demo = "arena_alloc.main:main"

[tool.hatch.build.targets.wheel]
packages = ["arena_alloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
