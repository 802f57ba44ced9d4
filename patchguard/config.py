import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, HasTraits, List, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .patchset import FORBIDDEN_PATHS


class PatchguardConfigurable(HasTraits):

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
    for c in _load_config_files('patchguard_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, PatchguardConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                overrides = disk_config[c.__name__]
                # Validate file values the same way as defaults
                c(**{k: v for k, v in overrides.items() if c.class_traits().get(k)})
                recursive_update(config, overrides, include_none)

    return config


class JSONPointerList(List):

    def validate_elements(self, obj, value):
        value = super(JSONPointerList, self).validate_elements(obj, value)
        for p in value:
            if p and not p.startswith('/'):
                raise TraitError('JSON pointers need to be empty or start with `/`, not %r' % p)
        return value


class Global(PatchguardConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Check(Global):

    forbidden_paths = JSONPointerList(
        Unicode(),
        default_value=sorted(FORBIDDEN_PATHS),
        help="JSON pointers that test operations may not target.",
    ).tag(config=True)


entrypoint_configurables = {
    'patchguard-check': Check,
}
