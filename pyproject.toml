[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wcgen"
version = "0.1.0"
description = "Word frequency counter and word cloud image generator for text, C++ source and PDF documents"
requires-python = ">=3.10"
dependencies = [
    "pillow>=10.1",
]
keywords = ["word cloud", "word frequency", "text analysis", "tokenizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wcgen = "wcgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wcgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
