pytest_plugins = ["mp_caml.testing.fixtures"]
