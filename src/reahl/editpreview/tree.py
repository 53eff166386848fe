from reahl.editpreview.changes import DomainException
from reahl.editpreview.changes import ResourceChange
from reahl.editpreview.changes import TextEdit


class UnknownPreviewNode(DomainException):
    pass


class PreviewNode:
    def __init__(self, node_id, uri, data=None, description=None, enabled=True):
        self.id = node_id
        self.uri = uri
        self.data = data
        self.description = description
        self.enabled = enabled
        self.children = []

    @property
    def is_resource_change(self):
        return isinstance(self.data, ResourceChange)

    @property
    def is_text_edit(self):
        return isinstance(self.data, TextEdit)

    @property
    def is_file_container(self):
        return self.data is None

    @property
    def resource_change(self):
        if not self.is_resource_change:
            raise DomainException(
                'Preview node %s does not wrap a resource change.' % self.id
            )
        return self.data

    @property
    def text_edit(self):
        if not self.is_text_edit:
            raise DomainException(
                'Preview node %s does not wrap a text edit.' % self.id
            )
        return self.data

    def add_child(self, child_node):
        self.children.append(child_node)
        return child_node

    def child_with_id(self, node_id):
        for child_node in self.children:
            if child_node.id == node_id:
                return child_node
        raise UnknownPreviewNode(
            'Preview node %s is not a child of %s (%s).'
            % (node_id, self.id, self.uri)
        )

    def enabled_children(self):
        return [child_node for child_node in self.children if child_node.enabled]

    def __repr__(self):
        return 'PreviewNode(%r, %r, enabled=%r)' % (
            self.id,
            self.uri,
            self.enabled,
        )


class PreviewTree:
    def __init__(self):
        self.nodes_by_uri = {}

    def register(self, uri, preview_node):
        self.nodes_by_uri[uri] = preview_node

    def top_node_for(self, uri):
        try:
            return self.nodes_by_uri[uri]
        except KeyError:
            raise UnknownPreviewNode(
                'No preview node is registered for %s.' % uri
            )

    def top_nodes(self):
        return list(self.nodes_by_uri.values())

    def uris(self):
        return list(self.nodes_by_uri.keys())

    def all_nodes(self):
        all_nodes = []
        for top_node in self.nodes_by_uri.values():
            all_nodes.append(top_node)
            all_nodes.extend(top_node.children)
        return all_nodes

    def node_with_id(self, node_id):
        for preview_node in self.all_nodes():
            if preview_node.id == node_id:
                return preview_node
        raise UnknownPreviewNode('No preview node has id %s.' % node_id)

    def __iter__(self):
        return iter(self.nodes_by_uri.items())

    def __len__(self):
        return len(self.nodes_by_uri)
