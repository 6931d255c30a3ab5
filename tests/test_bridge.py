import pytest

from designpatterns.structural.bridge import Car, EngineHonda, EngineLada, EngineSuzuki


@pytest.mark.parametrize(
    ("engine", "expected"),
    [
        (EngineSuzuki(), "SssuuuuZzzuuuuKkiiiii"),
        (EngineHonda(), "HhoooNnnnnnnnnDddaaaaaaa"),
        (EngineLada(), "PhhhhPhhhhPhPhPhPhPh"),
    ],
)
def test_car_sounds_like_its_engine(engine, expected):
    assert Car(engine).race() == expected
    assert engine.sound() == expected