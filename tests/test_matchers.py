import pytest

from cvakit.examples.matchers import Element, Props, Size, Theme, button, example


@pytest.mark.parametrize(
    "size, theme, elem, want",
    [
        (Size.SMALL, Theme.DANGER, Element.BUTTON, "px-4 py-1 px-2 bg-red-500 text-white rounded-md"),
        (
            Size.SMALL,
            Theme.DANGER,
            Element.LINK,
            "px-4 py-1 px-2 bg-red-500 text-white rounded-md text-blue-500 hover:text-blue-600 bg-transparent",
        ),
        (Size.SMALL, Theme.DANGER, Element.ICON, "px-4 py-1 px-2 bg-red-500 text-white rounded-full"),
        (Size.SMALL, Theme.PRIMARY, Element.BUTTON, "px-4 py-1 px-2 bg-blue-500 text-white rounded-md"),
        (
            Size.SMALL,
            Theme.PRIMARY,
            Element.LINK,
            "px-4 py-1 px-2 bg-blue-500 text-white rounded-md text-blue-500 hover:text-blue-600 bg-transparent",
        ),
        (Size.SMALL, Theme.PRIMARY, Element.ICON, "px-4 py-1 px-2 bg-blue-500 text-white rounded-full"),
        (
            Size.LARGE,
            Theme.DANGER,
            Element.BUTTON,
            "px-4 py-1 px-6 py-2 bg-red-500 text-white rounded-md font-bold",
        ),
        (
            Size.LARGE,
            Theme.DANGER,
            Element.LINK,
            "px-4 py-1 px-6 py-2 bg-red-500 text-white rounded-md font-bold "
            "text-blue-500 hover:text-blue-600 bg-transparent",
        ),
        (
            Size.LARGE,
            Theme.DANGER,
            Element.ICON,
            "px-4 py-1 px-6 py-2 bg-red-500 text-white rounded-full font-bold [&_svg]:size-5",
        ),
        (Size.LARGE, Theme.PRIMARY, Element.BUTTON, "px-4 py-1 px-6 py-2 bg-blue-500 text-white rounded-md"),
        (
            Size.LARGE,
            Theme.PRIMARY,
            Element.LINK,
            "px-4 py-1 px-6 py-2 bg-blue-500 text-white rounded-md text-blue-500 hover:text-blue-600 bg-transparent",
        ),
        (
            Size.LARGE,
            Theme.PRIMARY,
            Element.ICON,
            "px-4 py-1 px-6 py-2 bg-blue-500 text-white rounded-full [&_svg]:size-5",
        ),
    ],
)
def test_button_classes(size, theme, elem, want):
    assert button.classes(Props(size=size, theme=theme, element=elem)) == want


def test_default_props():
    assert button.classes(Props()) == "px-4 py-1 px-2 bg-red-500 text-white rounded-md"


def test_example_output(capsys):
    example()
    assert capsys.readouterr().out == (
        "px-4 py-1 px-6 py-2 bg-red-500 text-white rounded-md font-bold "
        "text-blue-500 hover:text-blue-600 bg-transparent\n"
    )