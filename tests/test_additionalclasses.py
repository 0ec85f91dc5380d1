import pytest

from cvakit.examples.additionalclasses import Props, button, example


@pytest.mark.parametrize(
    "size, custom, want",
    [
        ("small", ["bg-red-500"], "inline-flex items-center justify-center h-9 px-3 bg-red-500"),
        (
            "small",
            ["bg-red-500", "rounded-md"],
            "inline-flex items-center justify-center h-9 px-3 bg-red-500 rounded-md",
        ),
        ("medium", ["bg-red-500"], "inline-flex items-center justify-center h-10 px-4 py-2 bg-red-500"),
        (
            "medium",
            ["bg-red-500", "rounded-md"],
            "inline-flex items-center justify-center h-10 px-4 py-2 bg-red-500 rounded-md",
        ),
        ("large", ["bg-red-500"], "inline-flex items-center justify-center h-11 px-8 py-3 bg-red-500"),
        (
            "large",
            ["bg-red-500", "rounded-md"],
            "inline-flex items-center justify-center h-11 px-8 py-3 bg-red-500 rounded-md",
        ),
    ],
)
def test_button_classes(size, custom, want):
    assert button.classes(Props(size=size, classes=custom)) == want


def test_no_additional_classes():
    assert button.classes(Props(size="small")) == "inline-flex items-center justify-center h-9 px-3"


def test_example_output(capsys):
    example()
    out = capsys.readouterr().out
    assert out == "inline-flex items-center justify-center h-9 px-3 bg-red-500\n"