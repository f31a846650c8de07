""" A promise type keeping a directory present or absent. The promiser is
    the path to the directory, the single 'state' attribute says which.
"""

import os

import cfpromise
from cfpromise import ApplyResult, AttributeType, CheckResult


class Directory(cfpromise.PromiseType):

    name = 'directory_promise_module'
    version = '0.0.1'

    def required_attributes(self):
        return [('state', AttributeType.StringEnum(['present', 'absent']))]


    def check(self, promiser, attributes, log):

        should_be_present = attributes['state'] == 'present'
        exists = os.path.exists(promiser)

        if should_be_present == exists:
            return CheckResult.kept()

        if should_be_present:
            return CheckResult.not_kept('Directory %s should be present but is not' % (promiser))
        else:
            return CheckResult.not_kept('Directory %s should not be present but is there' % (promiser))


    def apply(self, promiser, attributes, log):

        should_be_present = attributes['state'] == 'present'
        exists = os.path.exists(promiser)

        if should_be_present == exists:
            return ApplyResult.kept()

        try:
            if should_be_present:
                os.mkdir(promiser)
                return ApplyResult.repaired('Created directory ' + promiser)
            else:
                os.rmdir(promiser)
                return ApplyResult.repaired('Removed directory ' + promiser)
        except OSError as e:
            return ApplyResult.not_kept(str(e))


# end of class Directory



if __name__ == '__main__':
    cfpromise.Executor().run(Directory())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
