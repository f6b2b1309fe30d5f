"""Single-page calculator UI that consumes the calculator API."""

from html import escape

from activity_burn.services.report import ABOUT


def render_page() -> str:
    """Return the calculator page with the static reference text filled in."""
    how_it_works = "\n".join(f"<li>{escape(item)}</li>" for item in ABOUT.how_it_works)
    references = "\n".join(f"<li>{escape(item)}</li>" for item in ABOUT.references)
    return (
        _PAGE_HTML.replace("{{how_it_works}}", how_it_works)
        .replace("{{references}}", references)
        .replace("{{reference_note}}", escape(ABOUT.reference_note))
        .replace("{{disclaimer}}", escape(ABOUT.disclaimer))
    )


_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Daily Activity Calorie Burn</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .grid { display: grid; grid-template-columns: 2fr 1fr; gap: 1.5rem; }
      .card { border: 1px solid #ddd; border-radius: 1rem; padding: 1rem;
              margin-bottom: 1rem; }
      .row { display: grid; grid-template-columns: 3fr 1fr 1fr; gap: 0.5rem;
             align-items: center; margin-bottom: 0.4rem; }
      .total { font-size: 2rem; font-weight: 600; }
      .muted { color: #666; font-size: 0.85rem; }
      input[type=number] { width: 6rem; padding: 0.3rem; }
      button { padding: 0.4rem 0.8rem; }
    </style>
  </head>
  <body>
    <h1>Daily Activity Calorie Burn</h1>
    <p class="muted">Tick the activities you performed today, enter minutes,
      and get an estimated total calories burned.</p>
    <div class="grid">
      <div>
        <div class="card">
          <label>Body weight (kg)
            <input id="weight" type="number" min="30" max="200" /></label>
          <label>Sex
            <select id="sex"><option>Women</option><option>Men</option></select>
          </label>
          <label>General activity level
            <select id="level">
              <option>Sedentary</option><option>Moderate</option>
              <option>High</option>
            </select>
          </label>
        </div>
        <div class="card">
          <h2>Household &amp; Gardening Activities</h2>
          <div id="activities"></div>
          <button id="reset">Reset</button>
        </div>
      </div>
      <div>
        <div class="card">
          <h2>Your Results</h2>
          <div class="muted">Total calories burned (today)</div>
          <div class="total" id="total">0 kcal</div>
          <div class="muted">Estimated from selected activities and minutes,
            scaled to your body weight via linear interpolation of kcal/hr
            values.</div>
          <ul id="breakdown"></ul>
        </div>
        <div class="card">
          <h2>Reference daily burn ranges</h2>
          <div id="reference"></div>
          <p class="muted">{{reference_note}}</p>
        </div>
        <div class="card">
          <h2>How this calculator works</h2>
          <ul>{{how_it_works}}</ul>
        </div>
        <div class="card">
          <h2>References</h2>
          <ul>{{references}}</ul>
        </div>
      </div>
    </div>
    <p class="muted" id="error" role="alert"></p>
    <footer class="muted">{{disclaimer}}</footer>
    <script>
      let calculatorId = null;
      let latestRequest = 0;

      async function call(method, path, body) {
        const res = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        if (!res.ok) {
          throw new Error('Request failed: ' + res.status);
        }
        return res.json();
      }

      function render(view) {
        calculatorId = view.id;
        const weight = document.getElementById('weight');
        if (document.activeElement !== weight) weight.value = view.weight_kg;
        document.getElementById('sex').value = view.sex;
        document.getElementById('level').value = view.level;
        const list = document.getElementById('activities');
        list.innerHTML = '';
        for (const a of view.activities) {
          const row = document.createElement('div');
          row.className = 'row';
          const label = document.createElement('label');
          const box = document.createElement('input');
          box.type = 'checkbox';
          box.checked = a.checked;
          box.onchange = () => mutate('POST',
            `/calculators/${calculatorId}/activities/${a.activity_id}/toggle`);
          label.append(box, ' ' + a.label);
          const rate = document.createElement('div');
          rate.innerHTML = '<span class="muted">kcal/hr</span> '
            + a.kcal_per_hour_display;
          const minutes = document.createElement('input');
          minutes.type = 'number';
          minutes.min = 0;
          minutes.max = 720;
          minutes.value = a.minutes;
          minutes.disabled = !a.checked;
          minutes.onchange = () => mutate('PUT',
            `/calculators/${calculatorId}/activities/${a.activity_id}/minutes`,
            { minutes: minutes.value });
          row.append(label, rate, minutes);
          list.append(row);
        }
        document.getElementById('total').textContent =
          view.total_kcal_display + ' kcal';
        const breakdown = document.getElementById('breakdown');
        breakdown.innerHTML = '';
        for (const x of view.breakdown) {
          const item = document.createElement('li');
          item.textContent = x.label + ': ' + x.kcal_display + ' kcal';
          breakdown.append(item);
        }
        const r = view.reference;
        document.getElementById('reference').innerHTML =
          `<div class="muted">Selected: ${r.sex} · ${r.level}</div>`
          + `<div>Daily: ${r.daily[0]}–${r.daily[1]} kcal</div>`
          + `<div>Weekly: ${r.weekly[0]}–${r.weekly[1]} kcal</div>`;
      }

      async function mutate(method, path, body) {
        const requestId = ++latestRequest;
        const error = document.getElementById('error');
        try {
          const view = await call(method, path, body);
          if (requestId !== latestRequest) return;
          error.textContent = '';
          render(view);
        } catch (err) {
          if (requestId === latestRequest) error.textContent = err.message;
        }
      }

      function updateProfile(field, value) {
        return mutate('PUT', `/calculators/${calculatorId}/profile`,
          { [field]: value });
      }

      document.getElementById('weight').oninput =
        (e) => updateProfile('weight_kg', e.target.value);
      document.getElementById('sex').onchange =
        (e) => updateProfile('sex', e.target.value);
      document.getElementById('level').onchange =
        (e) => updateProfile('level', e.target.value);
      document.getElementById('reset').onclick =
        () => mutate('POST', `/calculators/${calculatorId}/reset`);

      mutate('POST', '/calculators');
    </script>
  </body>
</html>
"""
