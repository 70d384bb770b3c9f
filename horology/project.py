identity = 'horology'
name = 'horology'
abstract = 'Calendar arithmetic over instants, dates, periods, and intervals.'
icon = '⌛'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
