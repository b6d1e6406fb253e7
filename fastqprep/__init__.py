"""FASTQ preprocessing building blocks: overlap analysis, merging, tail trimming and options."""

__version__ = "1.0.0"