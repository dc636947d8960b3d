from .option import Option, Some, NONE, from_nullable, is_option
from .errors import ValueAbsent
from .codec import OptionEncoder, dumps, to_jsonable, loads_field
from .logger import ConsoleLogger
from .instrument import instrument
