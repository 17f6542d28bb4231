
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Integer, Bool, List, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .editing import DEFAULT_FIELDS
from .patching import FormattingOptions


CONFIG_BASENAME = 'jsoncpatch_config'


class JsoncPatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        "Current values of the config traits `cls` itself declares."
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_config_cache = {}
def config_instance(cls):
    if cls not in _config_cache:
        _config_cache[cls] = cls()
    return _config_cache[cls]


def config_search_path():
    """Directories searched for config files, highest priority first.

    The current directory comes before the jupyter config path.
    """
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def _load_config_files(path):
    """Yield the config found in each directory of `path`.

    Lowest priority comes first, so that later configs can be layered
    on top of earlier ones.
    """
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    Unless `include_none` is set, None values delete their keys and
    emptied subdicts are pruned.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            sub = target.setdefault(k, {})
            recursive_update(sub, v, include_none)
            if not include_none and not sub:
                del target[k]
        elif v is None and not include_none:
            target.pop(k, None)
        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    """Effective config of an entry point as a flat dict.

    Trait defaults of every configurable the entry point inherits from
    are layered with the sections of the config files named after
    those configurables.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    disk_config = {}
    for c in _load_config_files(config_search_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, JsoncPatchConfigurable):
            continue
        recursive_update(config, config_instance(cls).configured_traits(cls), include_none)
        if cls.__name__ in disk_config:
            recursive_update(config, disk_config[cls.__name__], include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsoncPatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Formatting(JsoncPatchConfigurable):

    tab_size = Integer(
        2,
        help="Number of spaces per indentation level of inserted members, "
             "when there are no sibling members to copy the indentation from.",
    ).tag(config=True)

    insert_spaces = Bool(
        True,
        help="Indent inserted members with spaces rather than tabs.",
    ).tag(config=True)

    eol = Enum(
        ('\n', '\r\n', '\r'),
        None,
        allow_none=True,
        help="Line ending of inserted text. Default is the line ending "
             "already used by the document.",
    ).tag(config=True)


class Edit(JsoncPatchConfigurable):

    fields = List(
        Unicode(),
        list(DEFAULT_FIELDS),
        help="The fields of a node that can be edited.",
    ).tag(config=True)


class Show(JsoncPatchConfigurable):

    use_color = Bool(
        True,
        help="Use ANSI color code escapes for text output.",
    ).tag(config=True)


class JsoncShow(Global, Show):
    pass


class JsoncPatch(Global, Formatting, Edit, Show):
    pass


entrypoint_configurables = {
    'jsoncshow': JsoncShow,
    'jsoncpatch': JsoncPatch,
}


def formatting_options(args):
    """Formatting options from parsed arguments or a config dict."""
    if isinstance(args, dict):
        args = Namespace(args)
    defaults = FormattingOptions()
    return FormattingOptions(
        tab_size=getattr(args, 'tab_size', defaults.tab_size),
        insert_spaces=getattr(args, 'insert_spaces', defaults.insert_spaces),
        eol=getattr(args, 'eol', defaults.eol),
    )


class Namespace(object):
    def __init__(self, adict):
        self.__dict__.update(adict)
