"""rusty-utils - Rust-inspired Result and Option types for Python"""

__version__ = "0.1.0"

from . import functional, option, result
from .exceptions import (
    ErrorType,
    ExpectError,
    InvalidArgumentError,
    PatternError,
    RustyUtilsError,
    UnwrapError,
)
from .functional import (
    Debounced,
    MemoizeStats,
    chunk,
    compose,
    constant,
    create_filter,
    create_mapper,
    create_reducer,
    curry2,
    curry3,
    debounce,
    disk_memoize,
    flip,
    group_by,
    identity,
    memoize,
    partial,
    partition,
    pipe,
    range_of,
    safe_get,
    safe_json_parse,
    safe_prop,
    throttle,
    unique,
    unique_by,
    zip_pairs,
)
from .option import (
    AsyncOption,
    Nothing,
    Option,
    Some,
    collect_some,
    from_nullable,
    find_some,
    is_none,
    is_some,
    map2,
    map3,
    none,
    some,
    to_nullable,
    to_undefined,
)
from .option import and_then as and_then_option
from .option import and_then_async as and_then_option_async
from .option import combine as combine_options
from .option import combine_async as combine_options_async
from .option import expect as expect_option
from .option import filter as filter_option
from .option import map as map_option
from .option import map_async as map_option_async
from .option import match as match_option
from .option import or_else as or_else_option
from .option import unwrap as unwrap_option
from .option import unwrap_or as unwrap_or_option
from .option import unwrap_or_else as unwrap_or_else_option
from .result import (
    AsyncResult,
    Err,
    MaybeAsyncResult,
    Ok,
    Result,
    err,
    is_err,
    is_ok,
    map_err,
    ok,
    try_catch,
    try_catch_async,
)
from .result import and_then as and_then_result
from .result import and_then_async as and_then_result_async
from .result import combine as combine_results
from .result import combine_async as combine_results_async
from .result import expect as expect_result
from .result import filter as filter_result
from .result import map as map_result
from .result import map_async as map_result_async
from .result import match as match_result
from .result import or_else as or_else_result
from .result import unwrap as unwrap_result
from .result import unwrap_or as unwrap_or_result
from .result import unwrap_or_else as unwrap_or_else_result

__all__ = [
    # Modules
    "result",
    "option",
    "functional",
    # Result type
    "Result",
    "AsyncResult",
    "MaybeAsyncResult",
    "Ok",
    "Err",
    "ok",
    "err",
    "is_ok",
    "is_err",
    "map_result",
    "map_err",
    "and_then_result",
    "or_else_result",
    "unwrap_or_result",
    "unwrap_or_else_result",
    "unwrap_result",
    "expect_result",
    "match_result",
    "map_result_async",
    "and_then_result_async",
    "combine_results",
    "combine_results_async",
    "try_catch",
    "try_catch_async",
    "filter_result",
    # Option type
    "Option",
    "AsyncOption",
    "Some",
    "Nothing",
    "some",
    "none",
    "is_some",
    "is_none",
    "from_nullable",
    "to_nullable",
    "to_undefined",
    "map_option",
    "and_then_option",
    "or_else_option",
    "unwrap_or_option",
    "unwrap_or_else_option",
    "unwrap_option",
    "expect_option",
    "match_option",
    "map_option_async",
    "and_then_option_async",
    "filter_option",
    "map2",
    "map3",
    "combine_options",
    "combine_options_async",
    "find_some",
    "collect_some",
    # Functional helpers
    "pipe",
    "compose",
    "curry2",
    "curry3",
    "partial",
    "identity",
    "constant",
    "flip",
    "memoize",
    "disk_memoize",
    "MemoizeStats",
    "debounce",
    "Debounced",
    "throttle",
    "create_filter",
    "create_mapper",
    "create_reducer",
    "safe_get",
    "safe_prop",
    "safe_json_parse",
    "range_of",
    "chunk",
    "group_by",
    "unique",
    "unique_by",
    "zip_pairs",
    "partition",
    # Exceptions
    "RustyUtilsError",
    "ErrorType",
    "UnwrapError",
    "ExpectError",
    "PatternError",
    "InvalidArgumentError",
]
