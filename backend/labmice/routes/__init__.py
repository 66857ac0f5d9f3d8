from importlib import import_module

modules = [
    'users',
    'mice',
    'log_entries',
    'labs',
]

for m in modules:
    import_module(f'.{m}', __name__)

__all__ = modules
