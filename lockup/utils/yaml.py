# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Settings are kept in yaml files holding a single mapping.

A file can name a base file under the `extends` key, its own values are then deep merged over the base's. Bases can
extend further files, the whole chain is read from the most specific file up to the root:

    unittests.yml  --extends-->  testnet.yml  --extends-->  mainnet.yml

A base name is looked up next to the file that names it and, failing that, under `custom_root`, which is how files
outside the package can extend the packaged ones by name.
"""

from functools import reduce
from pathlib import Path
from typing import Any, Iterator, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

from lockup.utils.dict import deep_merge

EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must hold a mapping, an empty file is an empty dict."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    contents = yaml.safe_load(path.read_text())
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def _locate_base(path: Path, name: str, custom_root: Optional[Path]) -> Path:
    sibling = path.parent / name
    if sibling.is_file() or custom_root is None:
        return sibling
    return custom_root / name


def iter_extends_chain(
    filepath: Union[Path, str],
    custom_root: Optional[Path] = None,
) -> Iterator[tuple[Path, dict[str, Any]]]:
    """Yield each file of the chain and its own values (without `extends`), most specific first."""
    visited: set[Path] = set()
    path = Path(filepath)
    while True:
        resolved = path.resolve()
        if resolved in visited:
            raise ValueError('Cannot parse yaml with recursive extensions.')
        visited.add(resolved)

        values = dict_from_yaml(filepath=path)
        base = values.pop(EXTENDS_KEY, None)
        yield path, values
        if not base:
            return
        path = _locate_base(path, str(base), custom_root)


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """Read the file and everything it extends, merged into a single mapping."""
    layers = [values for _, values in iter_extends_chain(filepath, custom_root)]
    return reduce(deep_merge, reversed(layers), {})


def model_from_extended_yaml(model: type[T], *, filepath: str, custom_root: Optional[Path] = None) -> T:
    return model.model_validate(dict_from_extended_yaml(filepath=filepath, custom_root=custom_root))
