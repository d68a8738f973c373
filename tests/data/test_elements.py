import numpy as np
import pytest

from gcube.data import elements


@pytest.mark.parametrize('number, symbol', [(0, 'Xx'), (1, 'H'), (6, 'C'), (79, 'Au'), (118, 'Og'), (200, 'Xx')])
def test_element_number_to_symbol(number, symbol):
    assert elements.element_number_to_symbol(number) == symbol


@pytest.mark.parametrize('label, number', [('C', 6), ('cl', 17), ('carbon', 6), ('8', 8), (26, 26)])
def test_element_label_to_number(label, number):
    assert elements.element_label_to_number(label) == number


def test_element_label_unknown():
    with pytest.raises(ValueError):
        elements.element_label_to_number('Unobtainium')


def test_covalent_radius():
    assert elements.covalent_radius(1) == pytest.approx(0.31)
    assert elements.covalent_radius(250) == pytest.approx(1.50)


def test_covalent_radii():
    radii = elements.covalent_radii(np.array([1, 6, 250], dtype=np.uint8))
    np.testing.assert_allclose(radii, [0.31, 0.76, 1.50])
