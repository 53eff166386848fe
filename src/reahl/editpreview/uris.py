from urllib.parse import unquote
from urllib.parse import urlparse


def uri_path(uri):
    if uri.startswith('/'):
        return uri
    return unquote(urlparse(uri).path)


def path_segments(path):
    return [segment for segment in path.split('/') if segment]


def last_segment(path):
    segments = path_segments(path)
    return segments[-1] if segments else ''


def without_last_segment(path):
    return '/'.join(path_segments(path)[:-1])


def workspace_path(uri):
    # AI: Workspace uris carry the workspace root (e.g. /projects) as their
    # first segment; files directly under a root keep their full path.
    segments = path_segments(uri_path(uri))
    if len(segments) > 1:
        segments = segments[1:]
    return '/'.join(segments)


def file_name(uri):
    return last_segment(uri_path(uri))


def file_node_description(uri):
    path = workspace_path(uri)
    return '%s - %s' % (last_segment(path), without_last_segment(path))


def parent_of_uri(uri):
    return uri.rstrip('/').rpartition('/')[0]


def name_in_uri(uri):
    return uri.rstrip('/').rpartition('/')[2]


def resource_change_description(current, new_uri):
    if not current or not new_uri:
        return None
    if parent_of_uri(current) != parent_of_uri(new_uri):
        return None
    return "Rename resource '%s' to '%s'" % (
        name_in_uri(current),
        name_in_uri(new_uri),
    )
