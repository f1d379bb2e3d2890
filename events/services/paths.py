"""Public paths rendering event data."""


def event_paths(event_id=None):
    paths = ['/', '/events/']
    if event_id is not None:
        paths.append(f'/events/{event_id}/')
    return paths
