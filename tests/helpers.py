"""Small stand-ins shared by the operator tests"""


class FixedRandom:
    """Stands in for a numpy Generator where a test needs a known draw"""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def constant_fitness(value):
    return lambda x, y: value


def x_fitness(x, y):
    return x
