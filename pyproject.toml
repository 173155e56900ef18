[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerbox"
version = "0.1.0"
description = "A workbench of small algorithms, bit tricks, toy ciphers, checksums, a book catalogue and a chat room"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "dynamic-programming",
    "graphs",
    "bits",
    "crc",
    "rsa",
    "sha2",
    "sqlite",
    "chat",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerbox-graphs = "tinkerbox.graphs:main"
tinkerbox-sorting = "tinkerbox.sorting:main"
tinkerbox-recursion = "tinkerbox.recursion:main"
tinkerbox-dynamic = "tinkerbox.dynamic:main"
tinkerbox-bits = "tinkerbox.bits:main"
tinkerbox-wordcount = "tinkerbox.wordcount:main"
tinkerbox-ciphers = "tinkerbox.ciphers:main"
tinkerbox-crc = "tinkerbox.crc:main"
tinkerbox-sha2 = "tinkerbox.sha2:main"
tinkerbox-books = "tinkerbox.bookstore_cli:main"
tinkerbox-ip = "tinkerbox.ipaddr:main"
tinkerbox-chat-server = "tinkerbox.chat:server_main"
tinkerbox-chat-client = "tinkerbox.chat:client_main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
