"""
Signup form example.

A headless signup form with nested paths, a list field and a cross-field
dependency: changing the password re-validates the confirmation field.

Run with:
    python examples/signup_form.py
"""
import logging

from formstate import CHANGE, SUBMIT, Field, FormController, SubmitEvent


def required(label):
    def check(value):
        return None if value else f"{label} is required"
    return check


def build_form():
    controller = FormController()

    def passwords_match(value):
        if value != controller.get_value('account.password'):
            return "Passwords do not match"
        return None

    fields = [
        Field('account.email', controller.updater,
              validate=required("Email"), validate_on_blur=True),
        Field('account.password', controller.updater,
              validate=required("Password"), notify=['account.confirm']),
        Field('account.confirm', controller.updater,
              validate=passwords_match, validate_on_change=True),
        Field('interests[0]', controller.updater, initial_value='python'),
    ]
    for field in fields:
        field.mount()
    return controller, {field.name: field for field in fields}


def main():
    logging.basicConfig(level=logging.INFO)
    log = logging.getLogger('signup')

    controller, fields = build_form()
    controller.on(CHANGE, lambda: log.debug("state changed"))
    controller.on(SUBMIT, lambda: log.info(f"Submitted: {controller.get_form_state().values}"))

    form_api = controller.get_form_api()
    form_api.set_value('account.email', 'ada@example.com')
    form_api.set_value('account.confirm', 'secret')
    log.info(f"confirm error before password: {controller.get_error('account.confirm')!r}")

    # Typing the password re-validates 'account.confirm'
    form_api.set_value('account.password', 'secret')
    log.info(f"confirm error after password: {controller.get_error('account.confirm')!r}")

    form_api.submit_form(SubmitEvent())

    form_api.reset()
    log.info(f"after reset: {form_api.get_values()} pristine={controller.pristine()}")

    fields['interests[0]'].unmount()
    log.info(f"after unmount: {form_api.get_values()}")


if __name__ == '__main__':
    main()
