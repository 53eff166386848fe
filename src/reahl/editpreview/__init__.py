from reahl.editpreview.changes import ChangeSet
from reahl.editpreview.changes import DomainException
from reahl.editpreview.changes import Position
from reahl.editpreview.changes import Range
from reahl.editpreview.changes import ResourceChange
from reahl.editpreview.changes import TextEdit
from reahl.editpreview.preview import ChangePreview
from reahl.editpreview.preview import PreviewSession
from reahl.editpreview.reconciler import EditTreeReconciler
from reahl.editpreview.reconciler import SequentialNodeIds
from reahl.editpreview.text_editing import apply_text_edits
from reahl.editpreview.tree import PreviewNode
from reahl.editpreview.tree import PreviewTree
from reahl.editpreview.tree import UnknownPreviewNode

__version__ = '0.1.0'

__all__ = [
    'ChangePreview',
    'ChangeSet',
    'DomainException',
    'EditTreeReconciler',
    'Position',
    'PreviewNode',
    'PreviewSession',
    'PreviewTree',
    'Range',
    'ResourceChange',
    'SequentialNodeIds',
    'TextEdit',
    'UnknownPreviewNode',
    'apply_text_edits',
]
