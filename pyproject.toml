[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyforge"
version = "0.1.0"
description = "secp256k1 elliptic-curve arithmetic, the Keccak-f[1600] permutation and text helpers"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["secp256k1", "elliptic curve", "keccak", "hash160", "public key"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["keyforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
