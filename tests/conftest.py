from said.util.beartype import maybe_setup_beartype

# Must happen before any test module imports the rest of the package
maybe_setup_beartype()
