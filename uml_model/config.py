"""
Copyright© 2024 Evert van de Waal

This file is part of uml_model.

uml_model is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

uml_model is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with Foobar; if not, write to the Free Software
Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
"""
from dataclasses import dataclass
import logging


@dataclass
class Configuration:
    default_name: str   = 'defaultName'
    default_width: int  = 10
    default_height: int = 10
    log_level: str      = 'WARNING'


    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            raise ValueError(f"Unknown log level {self.log_level}")
        if self.default_width < 0 or self.default_height < 0:
            raise ValueError(f"Default size can not be negative: {self.default_width}x{self.default_height}")

    def apply_logging(self):
        logging.basicConfig(level=self.log_level)
