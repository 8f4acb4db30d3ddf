[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helpdesk"
version = "1.0.0"
description = "A small customer-support ticket desk: queue tickets, assign them to agents, resolve and log them."
requires-python = ">=3.10"
dependencies = []
keywords = ["helpdesk", "tickets", "support", "queue", "agents"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
helpdesk = "helpdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["helpdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
