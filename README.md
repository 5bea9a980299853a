# boxshop

boxshop holds the building blocks of a small web shop that runs as CGI
pages. It has no dependencies outside the standard library.

- `boxshop.reader` and `boxshop.html`: an HTML template reader that turns a
  page into a tree of tags and text, with class-based replication, hiding
  and `$(name)` variable substitution; `boxshop.ntree` is the tree beneath it.
- `boxshop.headers`: CGI response headers (status, Content-Type, Location,
  session cookie).
- `boxshop.validation` and `boxshop.card_validation`: checks for form entries,
  passwords, lengths and credit cards.
- `boxshop.url`: decoding of `+` and `%XX` escapes.
- `boxshop.regex`: the pattern helpers and patterns the template reader uses.
- `boxshop.digest`: SHA-256 password digests and hex output.
- `boxshop.product`, `boxshop.cart`, `boxshop.credit_card`, `boxshop.question`:
  the shop's records, with field sizes enforced.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Templates

Templates are plain HTML files. A tag with `class="name"` can be found by
that class, copied any number of times and filled with variables:

```python
from boxshop.html import UserState
from boxshop.reader import open_document, read_document

document = open_document(UserState.VISIT)
read_document(document, "products.html")

document.replicate("card", 0, 2)
document.set_variables("card", "product-name=Red box&product-price=$50", 0)
document.set_variables("card", "product-name=Blue box&product-price=$60", 1)
document.hide("subheader", 0)
print(document.render())
```

`Document.replicate` with a count below one hides the element instead, and
`Document.class_count` tells how many instances of a class are present.

Directives in a template comment:

- `<!-- @iflogged -->` shows the next tag only when the document's `login` is
  `UserState.LOGGED`;
- `<!-- @ifnlogged -->` shows it only to `UserState.VISIT`;
- `<!-- @component="file.html" -->` reads another template in its place.

## Headers

```python
from boxshop.headers import ContentValue, Headers, Status

headers = Headers()
headers.add_content_type(ContentValue.TEXT_HTML, ContentValue.CHARSET_UTF_8)
headers.set_status(Status.FOUND)
headers.add_location("index.cgi")
print(headers.render())
```

`render()` puts the `Status:` line first, ends each line with `\r\n` and
closes the block with a blank line.

## Helpers

```python
from boxshop.url import url_decode
from boxshop.validation import validate_entry, validate_password
from boxshop.regex import replace_variables
from boxshop.digest import sha256, to_hex

url_decode("name=Red+box%21")                    # "name=Red box!"
validate_password("password")                    # False: needs upper, lower, digit and punctuation
validate_entry('say "hi"')                       # False: ( ; " ) are refused
replace_variables("who=world", "hello $(who)")   # "hello world"
to_hex(sha256("abc"))                            # 64 hex characters
```

`url_decode` raises `ValueError` on a malformed escape.
`boxshop.card_validation.validate_card(number, month, year, csv, today)` checks
the number's length, issuer prefix and Luhn sum, a security code in 0..999 and
an expiry month after the current one.

## Records

```python
from boxshop.product import Product, ProductList
from boxshop.question import make_question

products = ProductList([Product(1, "Red box", 50, "A red box", quantity=2)])
products.total()                                  # 100

question = make_question("visitor@example.com", "Shipping", "How long?")
```

`make_question` and `boxshop.credit_card.make_credit_card` raise `ValueError`
when a field is missing or too long. `boxshop.cart.Cart` marks an unpaid cart
with the pay date `"-1"`.

## What it does not do

This package has no request handling (query string, POST body, session
cookie), no session tokens or user records, no database storage and no page
programs or command to run. It provides the templating, headers, validation
and record types such pages are built from.