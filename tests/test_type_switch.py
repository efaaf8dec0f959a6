from ygtools.type_switch import TypeSwitch


class Alpha:
    pass


class Beta(Alpha):
    pass


def test_switch_finds_case():
    switch = TypeSwitch()
    switch.case(int, "integer")
    switch.case(str, "text")
    assert switch.switch(int) == "integer"
    assert switch.switch(str) == "text"


def test_missing_case_is_none():
    switch = TypeSwitch()
    switch.case(int, "integer")
    assert switch.switch(float) is None


def test_case_is_replaced():
    switch = TypeSwitch()
    switch.case(Alpha, 1)
    switch.case(Alpha, 2)
    assert switch.switch(Alpha) == 2


def test_subclass_does_not_match_parent_case():
    switch = TypeSwitch()
    switch.case(Alpha, "alpha")
    assert switch.switch(Beta) is None
    switch.case(Beta, "beta")
    assert switch.switch(Beta) == "beta"
    assert switch.switch(Alpha) == "alpha"


def test_values_can_be_callables():
    switch = TypeSwitch()
    switch.case(list, len)
    handler = switch.switch(list)
    assert handler([1, 2, 3]) == 3