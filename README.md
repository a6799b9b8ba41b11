# lspy

A small Lisp interpreter. Program text is read into cons cells, which are
then evaluated in an environment of nested scopes.

## Installing

    pip install .

## Running programs

The `lspy` command reads a program from standard input, evaluates the first
expression in it in a fresh default environment, and writes the result to
standard error:

    echo "((lambda (x) (+ x 3)) 5)" | lspy

This prints `8`. Closures are printed as `<closure>` and builtins as
`<builtin>`. If reading or evaluating fails, the command writes
`error: <message>` to standard error and exits with status 1. The command
takes no arguments apart from `--help`.

## The language

- Integers (`42`, `-7`). They are Python integers, so they do not overflow.
- Strings in double quotes with the escapes `\a \f \n \r \t \\ \' \"`. Any
  other escape is a parse error.
- Symbols made of letters and the characters `+ - * / % < = > ~ ! $ @ & | ^ ? : _`.
- Lists `(1 2 3)`, dotted pairs `(1 . 2)` and dotted lists `(1 2 . 3)`.
- Special forms: `if`, `quote`, `define`, `set!`, `lambda`, `begin`.
  `define` and `set!` return `()`. A `lambda` body may hold several
  expressions. The value of the last one is returned.
- Builtins: `+ - * /`, `cons`, `car`, `cdr`, `set-car!`, `set-cdr!`, `map`,
  `fold`. `/` truncates towards zero and raises on division by zero.
  `fold` calls its function as `(f accumulator item)`.

The false values are `()`, `0` and the empty string. Everything else is true
except builtins, which have no truth value and raise an error when one is
tested.

## Using it from Python

```python
from lspy.reader import parse
from lspy.env import default_environment
from lspy.evaluator import evaluate
from lspy.builtins import to_string
from lspy.values import car

program = parse("(begin (define x 4) (set! x 3) (define y 5) (+ x y))")
result = evaluate(car(program), default_environment())
print(to_string(result))  # 8
```

- `lspy.reader.parse(text)` returns every expression in `text` as a list.
- `lspy.cli.run(source)` parses `source` and evaluates its first expression
  in a fresh default environment.
- `lspy.values` holds the value types `Symbol`, `Cons` and `Builtin`, and the
  helpers `cons`, `car`, `cdr`, `set_car`, `set_cdr`, `is_truthy`,
  `from_iterable` and `iterate`. Null is `None`, integers are `int` and
  strings are `str`.
- `lspy.env.Environment` provides `define`, `lookup`, `set`, `child` and
  `bindings`. `default_environment()` returns one that holds the builtins.
- `lspy.builtins` holds the arithmetic and list operations (`int_add`,
  `int_sub`, `int_mul`, `int_div`, `map_list`, `fold`, `reverse`) and
  `to_string`. `to_string` prints strings in quotes but does not escape them.
- `lspy.evaluator.evaluate(expr, env)` evaluates an expression. `Closure` is
  the procedure that `lambda` creates.

Errors raise `LispError` from `lspy.values`. It has two subclasses:
`ParseError` from `lspy.reader` and `UnboundSymbolError` from `lspy.env`.

## What it does not do

- There is no interactive prompt. The command evaluates only the first
  expression of its input. Any later expressions are parsed and then ignored.
- There are no comparison operators, no booleans and no hexadecimal string
  escapes. Nothing is loaded from files and there is no output builtin.

## Tests

    pip install .[test]
    pytest