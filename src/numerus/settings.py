import dataclasses
import json
import pathlib
import typing

import cattrs

from .counttypes import CountType
from .rules import RuleSet, resolve_rules

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(CountType, lambda ct: ct.value)
settings_converter.register_structure_hook(CountType, lambda v, _: CountType.coerce(v))


def structure_strict_str(v: typing.Any, typ: type[str]):
    if not isinstance(v, str):
        raise ValueError(f"Expected a string, got {v!r}")
    return v


settings_converter.register_structure_hook(str, structure_strict_str)


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: typing.Optional[pathlib.Path] = None
    count_type: CountType = CountType.WORDS
    rules: dict[str, str] = dataclasses.field(default_factory=dict)
    shortcodes: list[str] = dataclasses.field(default_factory=list)

    def resolve_rules(self, shortcodes: typing.Optional[list[str]] = None) -> RuleSet:
        """Returns the configured RuleSet; shortcodes, if given, replace those from the settings file."""
        if shortcodes is None:
            shortcodes = self.shortcodes
        return resolve_rules(self.rules, shortcodes=shortcodes)

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest is None:
            raise ValueError("No path to save settings to")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"Expected a JSON object in {src}")
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "count_type": "words",
                "rules": {"connector": r"--|\u2014|\u2013"},
                "shortcodes": ["gallery", "caption"],
            },
            cls,
        )


settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
