[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tokenizador"
version = "0.1.0"
description = "Split text and files into words using a configurable set of delimiter characters"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "tokenization", "delimiters", "text", "words"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tokenizador-demo = "tokenizador.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tokenizador"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
