from designpatterns.structural.facade import House, Man, Tree


def test_todo():
    man = Man(House(), Tree())
    assert man.todo() == "Build house\nTree grow"


def test_subsystems():
    assert House().build() == "Build house"
    assert Tree().grow() == "Tree grow"