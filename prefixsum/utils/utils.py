from progressbar import ProgressBar, SimpleProgress, Variable, Bar, AdaptiveETA


def lowest_set_bit(position):
    return position & -position


def highest_power_of_two(n):
    if n <= 0:
        return 0
    return 1 << (int(n).bit_length() - 1)


def create_progbar(target, stateful_metrics=None):
    widgets = [
        SimpleProgress(), ' ',
        Bar(marker='=', left='[', right=']', fill='.'), ' ',
        AdaptiveETA()
    ]

    for metric in stateful_metrics or ():
        widgets.extend([' - ', Variable(metric)])
    return ProgressBar(max_value=target, widgets=widgets, redirect_stdout=True)
