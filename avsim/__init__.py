__app_name__ = "AVSim"
__version__ = "0.1.0"
