[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "fastqprep"
version = "1.0.0"
description = "FASTQ preprocessing building blocks: overlap analysis, read merging, polyG/polyX trimming and option handling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fastq",
    "sequencing",
    "bioinformatics",
    "adapter-trimming",
    "quality-control",
    "paired-end",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["fastqprep*"]

[tool.pytest.ini_options]
addopts = "-ra"
