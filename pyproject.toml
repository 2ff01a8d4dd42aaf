[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "decorarch"
version = "0.1.0"
description = "Domain building blocks for layered services: event handler and notification models, AES-GCM encryption services and configuration builders."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["encryption", "aes-gcm", "notifications", "events", "configuration", "builder"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["decorarch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
