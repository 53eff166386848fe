import logging

from reahl.editpreview.tree import PreviewNode
from reahl.editpreview.tree import PreviewTree
from reahl.editpreview.uris import file_node_description
from reahl.editpreview.uris import resource_change_description


TEXTUAL_CHANGE_DESCRIPTION = 'Textual change'


class SequentialNodeIds:
    def __init__(self, prefix='preview-node-'):
        self.prefix = prefix
        self.next_number = 1

    def __call__(self):
        node_id = '%s%s' % (self.prefix, self.next_number)
        self.next_number = self.next_number + 1
        return node_id


class EditTreeReconciler:
    def __init__(self, new_node_id=None):
        self.new_node_id = new_node_id or SequentialNodeIds()

    def build_tree(self, change_set):
        preview_tree = PreviewTree()
        self.add_text_edit_nodes(preview_tree, change_set.changes)
        self.add_resource_change_nodes(
            preview_tree,
            change_set.resource_changes,
        )
        logging.getLogger(__name__).debug(
            'Built preview tree with %s top nodes and %s nodes in total',
            len(preview_tree),
            len(preview_tree.all_nodes()),
        )
        return preview_tree

    def add_text_edit_nodes(self, preview_tree, changes):
        for uri, text_edits in changes.items():
            file_node = PreviewNode(
                self.new_node_id(),
                uri,
                description=file_node_description(uri),
            )
            preview_tree.register(uri, file_node)
            for text_edit in text_edits:
                file_node.add_child(
                    PreviewNode(
                        self.new_node_id(),
                        uri,
                        data=text_edit,
                        description=TEXTUAL_CHANGE_DESCRIPTION,
                    )
                )

    def add_resource_change_nodes(self, preview_tree, resource_changes):
        for resource_change in resource_changes:
            resource_node = PreviewNode(
                self.new_node_id(),
                resource_change.new_uri,
                data=resource_change,
                description=resource_change_description(
                    resource_change.current,
                    resource_change.new_uri,
                ),
            )
            if resource_change.has_both_uris:
                preview_tree.register(resource_change.new_uri, resource_node)
            else:
                logging.getLogger(__name__).debug(
                    'Leaving %r out of the preview tree: it lacks a uri',
                    resource_change,
                )

    def set_enabled(self, preview_tree, preview_node, enabled):
        logging.getLogger(__name__).debug(
            'Setting enabled=%s on %r',
            enabled,
            preview_node,
        )
        if preview_node.is_resource_change:
            top_node = preview_tree.top_node_for(
                preview_node.resource_change.new_uri
            )
            top_node.enabled = enabled
            return
        top_node = preview_tree.top_node_for(preview_node.uri)
        if top_node.id == preview_node.id:
            top_node.enabled = enabled
            for child_node in top_node.children:
                child_node.enabled = enabled
        else:
            top_node.child_with_id(preview_node.id).enabled = enabled

    def reconcile(self, preview_tree, original_change_set):
        reconciled_change_set = original_change_set.copy()
        removed_text_edit_count = 0
        removed_resource_change_count = 0
        for uri, top_node in preview_tree:
            if top_node.is_resource_change:
                if not top_node.enabled:
                    removed_resource_change_count += (
                        reconciled_change_set.remove_resource_change(
                            top_node.resource_change
                        )
                    )
                continue
            if top_node.is_file_container and not top_node.enabled:
                removed_text_edit_count += len(
                    reconciled_change_set.remove_changes_for(uri)
                )
                continue
            for child_node in top_node.children:
                if not child_node.enabled:
                    removed_text_edit_count += (
                        reconciled_change_set.remove_text_edit(
                            uri,
                            child_node.text_edit,
                        )
                    )
        logging.getLogger(__name__).debug(
            'Reconciled change set: removed %s text edits and %s resource changes',
            removed_text_edit_count,
            removed_resource_change_count,
        )
        return reconciled_change_set

    def selection_diff(self, preview_tree, selected_node):
        if selected_node.is_resource_change:
            return []
        top_node = preview_tree.top_node_for(selected_node.uri)
        if top_node.id == selected_node.id:
            return [
                child_node.text_edit
                for child_node in top_node.enabled_children()
            ]
        selected_child = top_node.child_with_id(selected_node.id)
        if selected_child.enabled:
            return [selected_child.text_edit]
        return []
