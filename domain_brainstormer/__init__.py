"""Domain Brainstormer - generate, score and check brandable domain names."""

__version__ = "0.1.0"
