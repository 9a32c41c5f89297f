from .helpers import (
    CustomJSONEncoder as CustomJSONEncoder,
    quantize_money as quantize_money,
    money_formatter as money_formatter,
)
