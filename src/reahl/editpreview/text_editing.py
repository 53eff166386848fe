from difflib import unified_diff

from reahl.editpreview.changes import DomainException


NO_NEWLINE_MARKER = '\\ No newline at end of file\n'


class LineOffsets:
    def __init__(self, content):
        self.content = content
        self.line_starts = [0]
        for index, character in enumerate(content):
            if character == '\n':
                self.line_starts.append(index + 1)

    def line_end(self, line):
        if line + 1 >= len(self.line_starts):
            return len(self.content)
        line_end = self.line_starts[line + 1] - 1
        if line_end > self.line_starts[line] and self.content[line_end - 1] == '\r':
            line_end = line_end - 1
        return line_end

    def offset_of(self, position):
        if position.line >= len(self.line_starts):
            return len(self.content)
        line_start = self.line_starts[position.line]
        return min(line_start + position.character, self.line_end(position.line))


def planned_replacements(content, text_edits):
    line_offsets = LineOffsets(content)
    replacements = []
    for order, text_edit in enumerate(text_edits):
        start_offset = line_offsets.offset_of(text_edit.range.start)
        end_offset = line_offsets.offset_of(text_edit.range.end)
        if end_offset < start_offset:
            raise DomainException(
                'Text edit %r ends before it starts.' % (text_edit,)
            )
        is_insertion = start_offset == end_offset
        replacements.append(
            (start_offset, not is_insertion, order, end_offset, text_edit)
        )
    # AI: Insertions go before a replacement starting at the same offset.
    replacements.sort(key=lambda replacement: replacement[:3])
    previous_end_offset = 0
    previous_text_edit = None
    for start_offset, is_replacement, order, end_offset, text_edit in replacements:
        if previous_text_edit is not None and start_offset < previous_end_offset:
            raise DomainException(
                'Text edits %r and %r overlap.' % (previous_text_edit, text_edit)
            )
        previous_end_offset = end_offset
        previous_text_edit = text_edit
    return [
        (start_offset, end_offset, text_edit.new_text)
        for start_offset, is_replacement, order, end_offset, text_edit in replacements
    ]


def apply_text_edits(content, text_edits):
    output_parts = []
    copied_up_to = 0
    for start_offset, end_offset, new_text in planned_replacements(
        content,
        text_edits,
    ):
        output_parts.append(content[copied_up_to:start_offset])
        output_parts.append(new_text)
        copied_up_to = end_offset
    output_parts.append(content[copied_up_to:])
    return ''.join(output_parts)


def unified_diff_text(old_content, new_content, path):
    diff_lines = []
    for diff_line in unified_diff(
        old_content.splitlines(keepends=True),
        new_content.splitlines(keepends=True),
        fromfile='a/%s' % path,
        tofile='b/%s' % path,
    ):
        if diff_line.endswith('\n'):
            diff_lines.append(diff_line)
        else:
            diff_lines.append(diff_line + '\n')
            diff_lines.append(NO_NEWLINE_MARKER)
    return ''.join(diff_lines)
