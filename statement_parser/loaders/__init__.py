# statement_parser/loaders/__init__.py
from importlib import import_module


def get_loader(extension, config):
    """Instantiate the loader configured for ``extension`` (e.g. '.csv'), or return None."""
    loader_path = (config.get('file_loaders') or {}).get(extension.lower())
    if not loader_path:
        return None
    module_name, cls_name = loader_path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)(config)
