from prefixsum.utils.utils import lowest_set_bit, highest_power_of_two, create_progbar

__all__ = [
    'lowest_set_bit',
    'highest_power_of_two',
    'create_progbar'
]
