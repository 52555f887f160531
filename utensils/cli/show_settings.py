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

""" Prints the loaded settings as JSON, along with the file they were loaded from.
"""

import json
from typing import Optional


def main(argv: Optional[list[str]] = None) -> int:
    from utensils.cli.util import create_parser
    from utensils.conf.get_settings import get_global_settings, get_settings_source

    parser = create_parser()
    parser.parse_args(argv)

    settings = get_global_settings()
    data = {
        'source': get_settings_source(),
        'settings': json.loads(settings.json_dumpb()),
    }
    print(json.dumps(data, indent=4))
    return 0
