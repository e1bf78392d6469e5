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

"""Display a message with its header fields in a fixed order."""

import sys
import yaml
from getopt import getopt, GetoptError

from reorder_config import HeaderOrderConfiguration
from header_text import HeaderDisplayError
from message_view import MessageViewer
from reorder_headers import install_header_order, absent_headers

USAGE = 'usage: show-message [-f cfg] [-o Name,...] [-O] [-F] ' \
    '[-i regexp] [-H] [-v] [file]\n'

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
        pass
    cfg_file = None
    order = None
    disable = False
    full = False
    ignored = None
    headers_only = False
    verbose = False
    try:
        opts, args = getopt(argv, "f:o:OFi:Hv")
    except GetoptError as e:
        sys.stderr.write('%s\n' % e)
        sys.stderr.write(USAGE)
        sys.exit(1)
        pass
    for opt, val in opts:
        if opt == '-f':
            cfg_file = val
        elif opt == '-o':
            order = val
        elif opt == '-O':
            disable = True
        elif opt == '-F':
            full = True
        elif opt == '-i':
            ignored = val
        elif opt == '-H':
            headers_only = True
        elif opt == '-v':
            verbose = True
            pass
        continue

    try:
        conf = HeaderOrderConfiguration(cfg_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        sys.stderr.write('configuration: %s\n' % e)
        sys.exit(1)
        pass
    if order is not None:
        conf.set_header_order([ n.strip() for n in order.split(',')
                                if n.strip() != '' ])
        pass
    if disable:
        conf.set_header_order([ ])
        pass
    if full:
        conf.header_style = 'full'
        pass

    viewer = MessageViewer(conf)
    install_header_order(viewer)

    ## Read in the message.  Undecodable bytes are carried through
    ## unchanged.
    if len(args) > 0:
        try:
            with open(args[0], "rb") as fp:
                raw = fp.read()
                pass
        except OSError as e:
            sys.stderr.write('message: %s\n' % e)
            sys.exit(1)
            pass
        pass
    else:
        raw = sys.stdin.buffer.read()
        pass
    text = raw.decode('utf-8', 'surrogateescape')

    ## A header block ending in CRLF is worked on with LF endings and
    ## restored on the way out.  The body is passed through as it is.
    body = ''
    sep = text.find('\r\n\r\n')
    crlf = sep >= 0 and '\n\n' not in text[:sep]
    if crlf:
        body = text[sep + 4:]
        text = text[:sep + 4].replace('\r\n', '\n')
        pass

    try:
        if headers_only:
            out = viewer.headers(text, ignored_headers=ignored)
        else:
            out = viewer.show(text, ignored_headers=ignored).getvalue()
            pass
        if verbose and conf.enabled:
            for name in absent_headers(conf, text):
                sys.stderr.write('no %s header\n' % name)
                continue
            pass
    except HeaderDisplayError as e:
        sys.stderr.write('%s\n' % e)
        sys.exit(1)
        pass

    if crlf:
        out = out.replace('\n', '\r\n')
        if not headers_only:
            out += body
            pass
        pass
    sys.stdout.buffer.write(out.encode('utf-8', 'surrogateescape'))
    pass

if __name__ == '__main__':
    main()
    pass
