from .config_loader import load_config
from .errors import LoaderError
from .export import build_states_document, save_states_to_yaml

__all__ = ["load_config", "LoaderError", "build_states_document", "save_states_to_yaml"]
