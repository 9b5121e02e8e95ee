"""GloriaFood module - order and reservation sync into the booking sheet."""
