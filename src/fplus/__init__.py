"""
Module dependencies:
    basetypes.py:
        imports functools, types, typing
    show.py:
        depends on basetypes
        requires toolz
    maybe.py:
        depends on basetypes, show
        imports logging
        requires pydantic_core, toolz
    result.py:
        depends on basetypes, show, maybe
        imports logging
        requires toolz
    read.py:
        depends on basetypes, maybe, result
        imports functools, logging, re
        requires pydantic, toolz
    compare.py:
        depends on basetypes
        imports operator
    composition.py:
        depends on basetypes
        imports functools, inspect
        requires toolz
    numeric.py:
        depends on basetypes
        imports builtins, math
    container_common.py:
        depends on basetypes
        imports builtins, functools, itertools, operator
        requires toolz
    container_tools.py:
        depends on basetypes, container_common, maybe
        imports builtins, itertools, logging, operator, random
        requires toolz
    pairs.py:
        depends on basetypes
        requires toolz
    maps.py:
        depends on basetypes, maybe
        imports logging
        requires toolz
    combinatorics.py:
        depends on basetypes, container_common
        imports itertools
        requires toolz
    string_tools.py:
        depends on basetypes, composition, container_tools, show
        imports re
        requires toolz

Requirements:
    pydantic
    pydantic_core
    toolz

Several functions share their name with a builtin (sum, all, any, zip, enumerate, round, ...);
'from fplus import *' shadows those builtins.
"""
from fplus.basetypes import *
from fplus.show import *
from fplus.maybe import *
from fplus.result import *
from fplus.read import *
from fplus.compare import *
from fplus.composition import *
from fplus.numeric import *
from fplus.container_common import *
from fplus.container_tools import *
from fplus.pairs import *
from fplus.maps import *
from fplus.combinatorics import *
from fplus.string_tools import *
