[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mhttpclient"
version = "1.0.0"
description = "A small HTTP/1.1 client over plain sockets, with sync and threaded async requests and query-string builders"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "socket", "get", "post", "query-string", "url-encode"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mhttpclient = "mhttpclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mhttpclient"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
