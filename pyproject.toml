[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spws"
version = "0.1.0"
description = "Simulated smart plant watering system with a small leveled logger"
requires-python = ">=3.10"
dependencies = []
keywords = ["watering", "simulation", "iot", "logger", "home-automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spws = "spws.simulator:main"
spws-logdemo = "spws.logdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["spws"]

[tool.pytest.ini_options]
addopts = "-ra"
