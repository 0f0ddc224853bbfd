[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "op4cipher"
version = "0.1.0"
description = "The OP4 128-bit block cipher with ECB, CBC, OFB and CTR modes, plus hex dump helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "block-cipher", "cryptography", "ecb", "cbc", "ofb", "ctr", "hexdump"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
op4cipher-demo = "op4cipher.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["op4cipher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
