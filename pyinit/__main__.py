from pyinit.main import entry_point

entry_point()
