[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imagereloc"
version = "0.1.0"
description = "Container image references, digests, image sets and repository path mapping for relocating images"
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "image", "oci", "docker", "registry", "relocation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
irel = "imagereloc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["imagereloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
