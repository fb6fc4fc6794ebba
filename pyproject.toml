[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsdog"
version = "0.1.0"
description = "DNS wire-format record parsing and UDP, TCP, TLS and HTTPS transports"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "wire-format", "resource-records", "dns-over-tls", "dns-over-https"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dnsdog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
