import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.textdiff import GRANULARITIES


class NbalignConfigurable(HasTraits):

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
    for c in _load_config_files('nbalign_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, NbalignConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(NbalignConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Diffing(NbalignConfigurable):

    granularity = Enum(
        GRANULARITIES,
        'lines',
        help="Whether cell sources are diffed line by line or word by word.",
    ).tag(config=True)

    side_by_side = Bool(
        False,
        help="Print source changes as two synchronized columns.",
    ).tag(config=True)

    show_unchanged = Bool(
        False,
        help="Also print cells that did not change.",
    ).tag(config=True)

    color = Bool(
        True,
        help="Whether to color the printed diff.",
    ).tag(config=True)

    width = Integer(
        0,
        help="Total width of side-by-side output. 0 uses the terminal width.",
    ).tag(config=True)


class NbDiff(_Diffing, Global):
    pass


entrypoint_configurables = {
    'nbalign-diff': NbDiff,
}
