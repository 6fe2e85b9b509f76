pytest_plugins = ["ghostmr.testing.conftest"]
