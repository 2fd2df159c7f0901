from .words import utils, ops, store
from .arithmetic import compare, additive, multiplicative, division, bitwise, shift, conversion, bigint

BigInt = bigint.BigInt

MPIntError = utils.MPIntError
FormatError = utils.FormatError
DivideByZero = utils.DivideByZero
