[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levellog"
version = "0.1.0"
description = "Level-filtered message logging to files and UDP sockets, with small interactive and network commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log", "udp", "levels", "file-logger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
levellog-file-client = "levellog.file_client:main"
levellog-socket-writer = "levellog.socket_writer:main"
levellog-socket-reader = "levellog.socket_reader:main"

[tool.hatch.build.targets.wheel]
packages = ["levellog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
