from .utils import (
    BasedType,
    OptionShape,
    get_based,
    get_based_type,
    get_option_shape,
)
