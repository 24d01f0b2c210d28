# mdstore

mdstore is a small storefront that runs in a POSIX terminal and is driven
from the keyboard. It has a main menu with the entries *Administração*,
*Fazer Pedido* and *Documentação*, and an administration menu with the
entries *Produtos* and *Usuários*. The products screen has a search box, a
"Novo Produto" action that opens a form, and a table of products. Prices in
the table are formatted as `R$ 12,34`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
mdstore
mdstore --data path/to/products.dat
```

`--data` names the file that holds the product records. The default is
`../../../../data/products.dat`, relative to the current directory. If the
file cannot be read, the product table starts out empty.

### Keys

- The up and down arrows move the selection.
- Enter picks the selected item.
- In forms, Tab, the down arrow and Enter move to the next field. ESC then
  `s`, or Enter on the last field, saves the form. In a price field only
  digits and Backspace are accepted.
- ESC then Backspace goes back one screen and leaves a form without saving.
  On the main menu it quits the program.

Each read waits at most half a second for a key. The screen is redrawn after
every read, so the cursor and the selection marker blink. Keys are read
straight from the terminal with no line buffering and no echo.

## Data

Products are fixed-size binary records. Each record holds a 32-bit
little-endian id, a price in cents and a NUL-padded label field of 128 bytes.
A label can be at most 127 bytes of UTF-8. `mdstore.records.load_products`
reads every record in a file. `pack_product` and `unpack_products` convert
between `Product` objects and bytes.

## What it does not do

- Products added with the form are kept in memory for the session only. They
  are never written back to the data file.
- The search box takes text, but it does not filter the table.
- *Fazer Pedido*, *Usuários* and *Documentação* have no screens. Picking one of
  them returns to the menu at once.

## Building blocks

The parts of the program can also be used on their own:

- `mdstore.render.Renderer` writes text, bold markers and prices to a stream.
  `currency` takes an amount in cents.
- `mdstore.chooser.choose` draws a selection menu. It returns the chosen
  index, or `BACK_BUTTON` when the user goes back.
- `mdstore.form.run_form` runs a form made of `Field` entries of type
  `FieldType.TEXT`, `NUMBER` or `MONEY`. It returns whether the form was saved
  and sets each field's `value`.
- `mdstore.table.render_table` prints a grid of `Cell` values with
  `Align.LEFT` or `Align.RIGHT` alignment. Text that is too long is cut short
  with `...`.
- `mdstore.products_page.product_cells` builds the product table's cells.
- `mdstore.textinput.TextInput` is a bounded line editor. It raises
  `FieldFull` when a key arrives at a full field. `EditBuffer` is an unbounded
  line editor. `format_price` and `int_to_numeral` format numbers.
- `mdstore.terminal.decode_key` takes a function that returns byte values and
  turns escape sequences into single key codes such as `ARROW_UP` and
  `BACK_BUTTON`. `getch` reads one key from the terminal.
- `mdstore.navigation.Session` holds the renderer, the key source and the data
  path. `go_to` shows a page until it asks to go back.