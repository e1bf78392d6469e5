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

"""Copy the displayed header fields of a message to its view.

This is the reader's own display routine.  Headers appear in the order
they arrive in, filtered by the configured regular expressions.
"""

import re

from header_text import HeaderDisplayError, header_block, iter_entries

class NoHeadersSelected(HeaderDisplayError):
    pass

class BadPattern(HeaderDisplayError):
    pass

def _compile(ptn):
    try:
        return re.compile(ptn, re.IGNORECASE | re.MULTILINE)
    except re.error as e:
        raise BadPattern('Bad header pattern %r: %s' % (ptn, e)) from e
    pass

def copy_headers(conf, text, beg, end, view, ignored_headers=None):
    """Copy header fields of the message between 'beg' and 'end' in
    'text' to 'view'.

    If 'ignored_headers' is non-empty, fields whose names match that
    regexp are left out.  Otherwise, if the configuration has displayed
    headers, only fields matching those are copied.  Otherwise fields
    matching the configured ignored headers are left out, unless they
    also match the non-ignored headers.
    """
    block, pos = header_block(text, beg)

    ## Copy everything.
    if conf.header_style == 'full':
        view.write(block)
        return

    ## Copy only the selected fields.
    if conf.displayed_headers and not ignored_headers:
        displayed = _compile(conf.displayed_headers)
        for start, lim in iter_entries(block, pos):
            if displayed.match(block, start):
                view.write(block[start:lim])
                pass
            continue
        return

    ## Copy all but the ignored fields.
    if not ignored_headers:
        ignored_headers = conf.ignored_headers
        pass
    if not ignored_headers:
        raise NoHeadersSelected('No headers selected for display')
    ignored = _compile(ignored_headers)
    nonignored = None
    if conf.nonignored_headers:
        nonignored = _compile(conf.nonignored_headers)
        pass
    for start, lim in iter_entries(block, pos):
        if ignored.match(block, start) and \
           (nonignored is None or not nonignored.match(block, start)):
            continue
        view.write(block[start:lim])
        continue
    pass
