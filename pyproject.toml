[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptoeq"
version = "1.0.0"
description = "Classical ciphers and modular arithmetic helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "cipher",
    "caesar",
    "vigenere",
    "affine",
    "playfair",
    "vernam",
    "rail-fence",
    "transposition",
    "modular-arithmetic",
    "chinese-remainder-theorem",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptoeq = "cryptoeq.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptoeq"]

[tool.pytest.ini_options]
addopts = "-ra"
