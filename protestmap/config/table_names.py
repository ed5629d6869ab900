from enum import Enum


class TableNames(str, Enum):
    PROTESTS = "protests"
