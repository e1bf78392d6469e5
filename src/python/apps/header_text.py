## Copyright (c) 2026, Lancaster University
## All rights reserved.
##
## Redistribution and use in source and binary forms, with or without
## modification, are permitted provided that the following conditions
## are met:
##
## 1. Redistributions of source code must retain the above copyright
##    notice, this list of conditions and the following disclaimer.
##
## 2. Redistributions in binary form must reproduce the above
##    copyright notice, this list of conditions and the following
##    disclaimer in the documentation and/or other materials provided
##    with the distribution.
##
## 3. Neither the name of the copyright holder nor the names of its
##    contributors may be used to endorse or promote products derived
##    from this software without specific prior written permission.
##
## THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
## "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
## LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
## FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
## COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT,
## INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES
## (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
## SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
## HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT,
## STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
## ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED
## OF THE POSSIBILITY OF SUCH DAMAGE.

"""Locate header blocks and header entries within raw message text.

A message is held as a string.  Its header block runs from the start
of the message up to and including the newline that ends the last
header line; the blank line that follows separates it from the body.
An entry is one header field together with its continuation lines and
its trailing newline.  All positions are plain offsets, so nothing
here keeps any state between calls.
"""

import re

## A newline followed by something other than a space or tab marks the
## start of the next header line.
header_start = re.compile(r'\n[^ \t]')

class HeaderDisplayError(Exception):
    pass

class BadFormat(HeaderDisplayError):
    """The header block of a message could not be located."""
    pass

def find_header_limit(text, beg=0):
    """Return the offset just past the newline ending the last header
    line of the message starting at 'beg'."""
    pos = text.find('\n\n', beg)
    if pos < 0:
        raise BadFormat('Message at %d has no blank line after headers'
                        % beg)
    return pos + 1

def find_next_header_start(block, pos=0):
    """Return the offset of the first character of the next header line
    after 'pos', or None if no further header starts in 'block'."""
    m = header_start.search(block, pos)
    if m is None:
        return None
    return m.end() - 1

def find_entry_end(block, pos):
    lim = find_next_header_start(block, pos)
    if lim is None:
        return len(block)
    return lim

def find_entry(block, name):
    """Return the (start, end) span of the first entry for the field
    'name', or None.  The name is matched literally and with case
    significant."""
    m = re.search('^' + re.escape(name) + ':', block, re.MULTILINE)
    if m is None:
        return None
    return m.start(), find_entry_end(block, m.end())

def iter_entries(block, pos):
    """Yield the (start, end) span of each entry from 'pos' onwards."""
    while pos < len(block):
        lim = find_entry_end(block, pos)
        yield pos, lim
        pos = lim
        continue
    pass

def header_block(text, beg=0):
    """Return the header block of the message at 'beg', and the offset
    within it of the first header after its first line.

    The first line is skipped when looking for headers, since in a
    mailbox it is the envelope 'From ' line.  A block with no second
    header line is taken to be malformed.
    """
    lim = find_header_limit(text, beg)
    block = text[beg:lim]
    pos = find_next_header_start(block)
    if pos is None:
        raise BadFormat('Message at %d has no header after its first line'
                        % beg)
    return block, pos
