[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stellar_apdu"
version = "5.0.3"
description = "Binary helpers for Stellar signing-device APDU commands: integer codecs, varints, base32, base58, BIP32 paths, a read buffer and value formatting."
requires-python = ">=3.10"
dependencies = []
keywords = ["stellar", "apdu", "bip32", "base32", "base58", "varint"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["stellar_apdu"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
