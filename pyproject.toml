[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpcbench"
version = "0.1.0"
description = "Building blocks for RPC benchmarking: latency histograms, duration statistics, status codes, connection backoff and dial options."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpc", "benchmark", "histogram", "latency", "backoff", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rpcbench"]

[tool.pytest.ini_options]
addopts = "-ra"
