# fbdl

Pieces of a Functional Bus Description Language (FBDL) compiler front-end,
in pure Python with no runtime dependencies.

## What it provides

- `fbdl.lexer.tokenize(src, path="")` turns FBDL source (bytes or str)
  into a list of `fbdl.tokens.Token` objects that ends with an `EOF` token.
  Each token has a `kind` (`fbdl.tokens.Kind`), inclusive `start` and `end`
  byte indexes, and a `line` and `column`. Indentation becomes `INDENT` and
  `DEDENT` tokens. On the first lexical error it raises
  `fbdl.errors.TokenError`, whose string form shows the source line with the
  offending token marked by carets.
- `fbdl.tokens` also has `loc`, `text` and `join`, and `Kind` has
  `label`, `precedence`, `is_functionality`, `is_property` and `is_number`.
- `fbdl.scanner` holds the `Scanner` state and the literal scanners
  `scan_string`, `scan_bit_string` and `scan_number`.
- `fbdl.values` has `BitLiteral`, `make_bit_literal`,
  `bit_literal_from_int`, `Range`, `Time` and `type_name`.
- `fbdl.bitstr.BitStr` represents bit strings such as `x"AB"`, with
  `bit_width`, `char_width`, `extend`, `to_bin`, `to_int` and
  `value_literal`.
- `fbdl.ranges.SingleRange` and `MultiRange` compute the bit width a range
  needs.
- `fbdl.constants.Container` stores named constants grouped by type
  (`add_const`, `has_const`, `is_empty`).
- `fbdl.access` and `fbdl.access_array` describe how a functionality is
  placed in registers of a given bus width: `make_single`,
  `make_single_one_reg`, `make_single_n_regs`, and `make_array_one_reg`,
  `make_array_one_in_reg`, `make_array_n_regs`, `make_array_n_in_reg`,
  `make_array_n_in_reg_m_in_end_reg`, `make_array_one_in_n_regs`. Every
  access object reports `reg_count`, `start_addr`, `end_addr`,
  `start_bit`, `end_bit`, `width` and `to_dict`. `Sizes` holds block sizes.
- `fbdl.addrspace` has the `Single` and `Array` address spaces and the
  `start` and `end` helpers.
- `fbdl.functionality` models `Block`, `Blackbox`, `Config`, `Irq`,
  `Mask`, `Memory`, `Param`, `Proc`, `Return`, `Static`, `Status`,
  `Stream` and `Package` as dataclasses.
- `fbdl.lookup` finds functionalities by name in blocks, procs and streams.
- `fbdl.validation` checks base types (`is_base_type`), properties
  (`validate_property`, which raises `ValueError`), nesting
  (`is_valid_inner_type`) and has `align_to_power_of_2`.

## Example

```python
from fbdl.lexer import tokenize
from fbdl.access import make_single

tokens = tokenize(b"Main bus\n  c config\n    width = 6\n", "main.fbd")
print([tok.name() for tok in tokens])

acs = make_single(addr=2, start_bit=30, width=57, bus_width=32)
print(acs.reg_count(), acs.end_bit())  # 3 22
```

## What it does not do

There is no command-line tool. The package stops at tokens: it has no
parser that builds functionality trees from source, no instantiation of
types, and no pass that assigns registers or addresses to a whole bus.
The functionality classes and access layouts are there to be filled in and
used by such code.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```