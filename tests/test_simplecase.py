import pytest

from cvakit.examples.simplecase import Props, button, example

BASE = "inline-flex items-center justify-center"


@pytest.mark.parametrize(
    "size, variant_classes",
    [
        ("small", "h-9 px-3"),
        ("medium", "h-10 px-4 py-2 rounded-md"),
        ("large", "h-11 px-8 py-3 rounded-md"),
    ],
)
def test_button_classes(size, variant_classes):
    assert button.classes(Props(size=size)) == BASE + " " + variant_classes


def test_unknown_size_gives_base_only():
    assert button.classes(Props(size="huge")) == BASE


def test_example_output(capsys):
    example()
    assert capsys.readouterr().out == "inline-flex items-center justify-center h-10 px-4 py-2 rounded-md\n"