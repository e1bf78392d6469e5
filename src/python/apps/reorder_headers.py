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

"""Display header fields in a fixed order.

'render_headers' wraps the reader's header-copying routine.  When
reordering applies, each configured field is looked up from the top of
the header block and copied to the view in turn, so fields come out in
configured order rather than arrival order, and fields the message
lacks are simply left out.
"""

from header_text import header_block, find_entry

def render_headers(orig, conf, text, beg, end, view, ignored_headers=None):
    if not conf.header_order or ignored_headers or \
       conf.header_style == 'full':
        return orig(conf, text, beg, end, view, ignored_headers)

    block = header_block(text, beg)[0]
    for name in conf.header_order:
        span = find_entry(block, name)
        if span is None:
            continue
        start, lim = span
        view.write(block[start:lim])
        continue
    pass

def absent_headers(conf, text, beg=0):
    """List the configured fields that the message at 'beg' lacks."""
    block = header_block(text, beg)[0]
    return [ name for name in conf.header_order
             if find_entry(block, name) is None ]

def install_header_order(viewer):
    return viewer.add_advice(render_headers)

def uninstall_header_order(viewer):
    viewer.remove_advice(render_headers)
    pass
