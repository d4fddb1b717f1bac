import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Integer, Bool, HasTraits, List, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.config import KEY_ORDERS
from .log import LEVEL_NAMES



class JsondimeConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('jsondime_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JsondimeConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsondimeConfigurable):

    log_level = Enum(
        LEVEL_NAMES,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class AtomicPaths(List):

    def validate_elements(self, obj, value):
        value = super(AtomicPaths, self).validate_elements(obj, value)
        for p in value:
            if not p.startswith('/'):
                raise TraitError('atomic paths need to start with `/`')
        return value


class _Diffing(Global):

    key_order = Enum(
        KEY_ORDERS,
        'insertion',
        help="Order in which object keys are visited when diffing.",
    ).tag(config=True)

    atomic_paths = AtomicPaths(
        Unicode(),
        default_value=[],
        help="JSON pointers of values to replace as a whole instead of "
             "diffing them. Use `*` for any array index.",
    ).tag(config=True)


class _Output(Global):

    indent = Integer(
        2,
        help="Indentation of written JSON files.",
    ).tag(config=True)

    color = Bool(
        True,
        help="Whether to use colors when printing to the terminal.",
    ).tag(config=True)


class JsDiff(_Diffing, _Output):
    pass


class JsPatch(_Output):
    pass


entrypoint_configurables = {
    'jsdiff': JsDiff,
    'jspatch': JsPatch,
}
