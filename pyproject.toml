[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfmoddocs"
version = "0.15.0a0"
description = "Documentation model of Terraform modules: inputs, outputs, module calls, providers, requirements and resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "documentation", "modules", "infrastructure"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfmoddocs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
