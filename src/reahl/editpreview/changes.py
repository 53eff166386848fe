class DomainException(Exception):
    pass


class Position:
    def __init__(self, line, character):
        self.line = line
        self.character = character

    @classmethod
    def from_json(cls, position_json):
        try:
            line = position_json['line']
            character = position_json['character']
        except (KeyError, TypeError) as error:
            raise DomainException(
                'Invalid position %r: missing %s.' % (position_json, error)
            )
        if not isinstance(line, int) or not isinstance(character, int):
            raise DomainException(
                'Invalid position %r: line and character must be integers.'
                % (position_json,)
            )
        if line < 0 or character < 0:
            raise DomainException(
                'Invalid position %r: line and character must not be negative.'
                % (position_json,)
            )
        return cls(line, character)

    def as_json(self):
        return {'line': self.line, 'character': self.character}

    def as_tuple(self):
        return (self.line, self.character)

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return 'Position(%s, %s)' % (self.line, self.character)


class Range:
    def __init__(self, start, end):
        self.start = start
        self.end = end

    @classmethod
    def from_json(cls, range_json):
        try:
            start_json = range_json['start']
            end_json = range_json['end']
        except (KeyError, TypeError) as error:
            raise DomainException(
                'Invalid range %r: missing %s.' % (range_json, error)
            )
        return cls(Position.from_json(start_json), Position.from_json(end_json))

    @classmethod
    def spanning(cls, start_line, start_character, end_line, end_character):
        return cls(
            Position(start_line, start_character),
            Position(end_line, end_character),
        )

    def as_json(self):
        return {'start': self.start.as_json(), 'end': self.end.as_json()}

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self):
        return hash((self.start, self.end))

    def __repr__(self):
        return 'Range(%r, %r)' % (self.start, self.end)


class TextEdit:
    def __init__(self, range, new_text):
        self.range = range
        self.new_text = new_text

    @classmethod
    def from_json(cls, text_edit_json):
        try:
            range_json = text_edit_json['range']
        except (KeyError, TypeError) as error:
            raise DomainException(
                'Invalid text edit %r: missing %s.' % (text_edit_json, error)
            )
        new_text = text_edit_json.get('newText') or ''
        return cls(Range.from_json(range_json), new_text)

    def as_json(self):
        return {'range': self.range.as_json(), 'newText': self.new_text}

    def __eq__(self, other):
        if not isinstance(other, TextEdit):
            return NotImplemented
        return self.range == other.range and self.new_text == other.new_text

    def __hash__(self):
        return hash((self.range, self.new_text))

    def __repr__(self):
        return 'TextEdit(%r, %r)' % (self.range, self.new_text)


class ResourceChange:
    def __init__(self, current, new_uri):
        self.current = current
        self.new_uri = new_uri

    @classmethod
    def from_json(cls, resource_change_json):
        if not isinstance(resource_change_json, dict):
            raise DomainException(
                'Invalid resource change %r.' % (resource_change_json,)
            )
        return cls(
            resource_change_json.get('current'),
            resource_change_json.get('newUri'),
        )

    @property
    def has_both_uris(self):
        return bool(self.current) and bool(self.new_uri)

    def as_json(self):
        return {'current': self.current, 'newUri': self.new_uri}

    def __eq__(self, other):
        if not isinstance(other, ResourceChange):
            return NotImplemented
        return (
            self.current == other.current
            and self.new_uri == other.new_uri
        )

    def __hash__(self):
        return hash((self.current, self.new_uri))

    def __repr__(self):
        return 'ResourceChange(%r, %r)' % (self.current, self.new_uri)


class ChangeSet:
    def __init__(self, changes=None, resource_changes=None):
        self.changes = {
            uri: list(text_edits)
            for uri, text_edits in (changes or {}).items()
        }
        self.resource_changes = list(resource_changes or [])

    @classmethod
    def from_workspace_edit(cls, workspace_edit_json):
        if not isinstance(workspace_edit_json, dict):
            raise DomainException(
                'A workspace edit must be a JSON object, got %r.'
                % (workspace_edit_json,)
            )
        changes_json = workspace_edit_json.get('changes') or {}
        if not isinstance(changes_json, dict):
            raise DomainException(
                'The changes of a workspace edit must map uris to text edits.'
            )
        changes = {
            uri: [
                TextEdit.from_json(text_edit_json)
                for text_edit_json in text_edits_json or []
            ]
            for uri, text_edits_json in changes_json.items()
        }
        resource_changes = [
            ResourceChange.from_json(resource_change_json)
            for resource_change_json in (
                workspace_edit_json.get('resourceChanges') or []
            )
        ]
        return cls(changes, resource_changes)

    def as_workspace_edit(self):
        return {
            'changes': {
                uri: [text_edit.as_json() for text_edit in text_edits]
                for uri, text_edits in self.changes.items()
            },
            'resourceChanges': [
                resource_change.as_json()
                for resource_change in self.resource_changes
            ],
        }

    def copy(self):
        return self.__class__(self.changes, self.resource_changes)

    def is_empty(self):
        has_text_edits = any(self.changes.values())
        return not has_text_edits and not self.resource_changes

    @property
    def text_edit_count(self):
        return sum(len(text_edits) for text_edits in self.changes.values())

    def remove_changes_for(self, uri):
        return self.changes.pop(uri, [])

    def remove_text_edit(self, uri, text_edit):
        if uri not in self.changes:
            return 0
        remaining_text_edits = [
            existing_text_edit
            for existing_text_edit in self.changes[uri]
            if existing_text_edit != text_edit
        ]
        removed_count = len(self.changes[uri]) - len(remaining_text_edits)
        self.changes[uri] = remaining_text_edits
        return removed_count

    def remove_resource_change(self, resource_change):
        remaining_resource_changes = [
            existing_resource_change
            for existing_resource_change in self.resource_changes
            if existing_resource_change != resource_change
        ]
        removed_count = len(self.resource_changes) - len(
            remaining_resource_changes
        )
        self.resource_changes = remaining_resource_changes
        return removed_count

    def __eq__(self, other):
        if not isinstance(other, ChangeSet):
            return NotImplemented
        return (
            list(self.changes.items()) == list(other.changes.items())
            and self.resource_changes == other.resource_changes
        )

    def __repr__(self):
        return 'ChangeSet(%r, %r)' % (self.changes, self.resource_changes)
