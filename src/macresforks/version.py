from importlib.metadata import PackageNotFoundError, version

try:
    version = version("macresforks")
except PackageNotFoundError:
    version = "0.0.0"
