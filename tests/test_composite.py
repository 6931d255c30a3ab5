from designpatterns.structural.composite import Composite, Leaf


def test_nested_menu_rendering():
    submenu = Composite("Submenu")
    submenu.add(Leaf("Submenu Item 1"))

    root = Composite("Main Menu")
    root.add(Leaf("Menu Item 1"))
    root.add(Leaf("Menu Item 2"))
    root.add(submenu)

    assert root.operation() == (
        "Composite: Main Menu\n"
        "  Leaf: Menu Item 1\n"
        "  Leaf: Menu Item 2\n"
        "  Composite: Submenu\n"
        "  Leaf: Submenu Item 1\n"
        "\n"
    )


def test_leaf_operation():
    assert Leaf("Menu Item 1").operation() == "Leaf: Menu Item 1"


def test_empty_composite():
    assert Composite("Empty").operation() == "Composite: Empty\n"