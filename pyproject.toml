[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taifexmd"
version = "0.1.0"
description = "Decoders for TAIFEX tick-by-tick market data messages: common header, packed BCD fields, checksums and message bodies"
requires-python = ">=3.10"
dependencies = []
keywords = ["taifex", "market-data", "bcd", "order-book", "futures", "options"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taifexmd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
