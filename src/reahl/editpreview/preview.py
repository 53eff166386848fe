import logging

from reahl.editpreview.changes import DomainException
from reahl.editpreview.reconciler import EditTreeReconciler
from reahl.editpreview.text_editing import apply_text_edits
from reahl.editpreview.text_editing import unified_diff_text
from reahl.editpreview.uris import file_name
from reahl.editpreview.uris import workspace_path


class ChangePreview:
    def __init__(self, file_name, old_content, new_content, unified_diff=''):
        self.file_name = file_name
        self.old_content = old_content
        self.new_content = new_content
        self.unified_diff = unified_diff

    @property
    def has_differences(self):
        return self.old_content != self.new_content


class PreviewSession:
    def __init__(
        self,
        change_set,
        content_source,
        apply_workspace_edit,
        reconciler=None,
        title='',
    ):
        self.change_set = change_set
        self.content_source = content_source
        self.apply_workspace_edit = apply_workspace_edit
        self.reconciler = reconciler or EditTreeReconciler()
        self.title = title
        self.is_open = True
        self.accepted_change_set = None
        self.tree = self.reconciler.build_tree(change_set)

    def set_title(self, title):
        self.title = title

    def ensure_open(self, action_name):
        if not self.is_open:
            raise DomainException(
                'Cannot %s: the preview session is already closed.'
                % action_name
            )

    def node_with_id(self, node_id):
        return self.tree.node_with_id(node_id)

    def enabled_state_changed(self, preview_node, enabled):
        self.ensure_open('change enabled state')
        self.reconciler.set_enabled(self.tree, preview_node, enabled)

    def selected_text_edits(self, preview_node):
        return self.reconciler.selection_diff(self.tree, preview_node)

    def selection_changed(self, preview_node):
        self.ensure_open('preview a selection')
        if preview_node.is_resource_change:
            return None
        text_edits = self.selected_text_edits(preview_node)
        old_content = self.content_source(preview_node.uri)
        if old_content is None:
            logging.getLogger(__name__).debug(
                'No content for %s, nothing to preview',
                preview_node.uri,
            )
            return None
        new_content = apply_text_edits(old_content, text_edits)
        return ChangePreview(
            file_name(preview_node.uri),
            old_content,
            new_content,
            unified_diff=unified_diff_text(
                old_content,
                new_content,
                workspace_path(preview_node.uri),
            ),
        )

    def accept(self):
        self.ensure_open('accept')
        reconciled_change_set = self.reconciler.reconcile(
            self.tree,
            self.change_set,
        )
        logging.getLogger(__name__).debug(
            'Applying %s text edits and %s resource changes from preview %r',
            reconciled_change_set.text_edit_count,
            len(reconciled_change_set.resource_changes),
            self.title,
        )
        self.apply_workspace_edit(reconciled_change_set)
        self.accepted_change_set = reconciled_change_set
        self.close()
        return reconciled_change_set

    def cancel(self):
        logging.getLogger(__name__).debug('Cancelled preview %r', self.title)
        self.close()

    def back(self):
        logging.getLogger(__name__).debug(
            'Went back from preview %r',
            self.title,
        )
        self.close()

    def close(self):
        self.is_open = False
