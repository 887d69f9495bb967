class InputBuffer:
    '''
    Accumulates input lines until one of them carries the terminator.

    Expressions may then span lines: "2 +" then "3 =" is "2 +3". Lines are
    joined as they are, so "12" then "3 =" is "123".
    '''

    TERMINATOR = '='

    def __init__(self):
        self._text = ''

    def accept(self, line):
        '''
        Take a line; return (True, expression) once the terminator is seen.

        The expression is everything before the last terminator. Anything
        after it is dropped, as is the buffer. Otherwise, returns (False, '').
        '''
        self._text += line.rstrip('\r\n')
        index = self._text.rfind(self.TERMINATOR)
        if index < 0:
            return False, ''
        expression = self._text[:index]
        self.clear()
        return True, expression

    @property
    def pending(self):
        '''
        Text accepted so far, not yet terminated.
        '''
        return self._text

    def clear(self):
        self._text = ''
