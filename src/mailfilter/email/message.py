# Copyright (C) 2026 by the mailfilter developers.
#
# This file is part of mailfilter.
#
# mailfilter is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# mailfilter is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# mailfilter.  If not, see <http://www.gnu.org/licenses/>.

"""Standard mailfilter message object.

This is a subclass of email.message.Message with a slightly extended
interface which is more convenient for filter scripts.  Messages are parsed
with the compat32 policy so that headers come back out exactly as they went
in; a filter must never mangle the mail it files.
"""

__all__ = [
    'Message',
    'parse',
    'strip_envelope',
    ]


import re
import email
import email.message

from email.policy import compat32


# A Unix mailbox style envelope line, e.g. "From sender@example.com Sat Jan
# 1 00:00:00 2000", and its line terminator.
ENVELOPE_RE = re.compile(br'\AFrom (?P<sender>[^\r\n]*)(\r\n|\r|\n|\Z)')
BLANK_LINE_RE = re.compile(br'\r?\n\r?\n')
# Does the first line end in CRLF?
CRLF_RE = re.compile(br'[^\r\n]*\r\n')



class Message(email.message.Message):
    # The line separator of the parsed source, used again when serializing.
    linesep = '\n'

    def __init__(self, policy=compat32):
        super().__init__(policy)

    def header(self, name):
        """Return the first value of the named header.

        :param name: The header name, in any case.
        :return: The header value, or None if there is no such header.
        """
        return self.get(name)

    def all_headers(self, name):
        """Return all values of the named header, in message order.

        :param name: The header name, in any case.
        :return: The list of values, which is empty if there are none.
        """
        return self.get_all(name, [])

    @property
    def body(self):
        """The undecoded body text."""
        payload = self.get_payload()
        if isinstance(payload, list):
            # Multipart; hand back the raw text after the headers.
            parts = BLANK_LINE_RE.split(self.serialize(), 1)
            body = (parts[1] if len(parts) > 1 else b'')
            return body.decode('utf-8', 'surrogateescape')
        return ('' if payload is None else payload)

    @property
    def envelope_sender(self):
        """The envelope sender line stripped before parsing, or None."""
        return self.get_unixfrom()

    # Convenience accessors for the commonly filtered headers.

    @property
    def from_(self):
        return self.header('From')

    @property
    def to(self):
        return self.header('To')

    @property
    def cc(self):
        return self.header('Cc')

    @property
    def bcc(self):
        return self.header('Bcc')

    @property
    def subject(self):
        return self.header('Subject')

    @property
    def received(self):
        """All the Received headers, most recent first."""
        return self.all_headers('Received')

    def serialize(self):
        """Return the message as bytes, without the envelope line."""
        # No refolding; long header lines go out exactly as they came in.
        policy = self.policy.clone(linesep=self.linesep, max_line_length=None)
        return self.as_bytes(unixfrom=False, policy=policy)



def strip_envelope(data):
    """Split off a leading Unix mailbox envelope line.

    Only the very first line of the data is considered.  A line starting with
    'From ' anywhere else is left alone.

    :param data: The raw message.
    :type data: bytes
    :return: 2-tuple of the envelope line (sans terminator, or None if there
        was none) and the remaining data.
    :rtype: (bytes or None, bytes)
    """
    mo = ENVELOPE_RE.match(data)
    if mo is None:
        return None, data
    return mo.group(0).rstrip(b'\r\n'), data[mo.end():]


def parse(data):
    """Parse raw message data into a `Message`.

    Parsing never fails; malformed input produces a best effort message, with
    any problems recorded in its `defects`.  A leading envelope line is
    stripped first and remembered as the message's `envelope_sender`.

    The line separator is taken from the first line only.  When it is CRLF
    the whole message is serialized with CRLF, so a message mixing CRLF and
    bare LF line endings comes back out with CRLF throughout.

    :param data: The raw message.
    :type data: bytes or string
    :return: The parsed message.
    :rtype: `Message`
    """
    if isinstance(data, str):
        data = data.encode('utf-8', 'surrogateescape')
    envelope, data = strip_envelope(data)
    message = email.message_from_bytes(data, Message, policy=compat32)
    if CRLF_RE.match(data):
        message.linesep = '\r\n'
    if envelope is not None:
        message.set_unixfrom(envelope.decode('utf-8', 'surrogateescape'))
    return message
