# Copyright 2025 Hathor Labs
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

from pathlib import Path
from typing import Optional, Union

from pydantic import StrictBool, StrictInt

from utensils.utils import pydantic


class UtensilsSettings(pydantic.BaseModel):
    # Default `leave_open` policy of BigEndianReader, when false closing the reader also closes its source
    READER_LEAVE_OPEN: StrictBool = False

    # Seed of the module-level random generator used by `shuffle()` when no generator is given, `None` means the
    # generator is seeded from the OS
    SHUFFLE_SEED: Optional[StrictInt] = None

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'UtensilsSettings':
        """Takes a filepath to a yaml file and returns a validated UtensilsSettings instance."""
        from utensils.conf import DEFAULT_SETTINGS_FILEPATH
        from utensils.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(DEFAULT_SETTINGS_FILEPATH).parent)
